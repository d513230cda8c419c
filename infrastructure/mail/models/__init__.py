"""邮件存储数据模型"""

from infrastructure.mail.models.key_value_document_model import Base, KeyValueDocumentModel

__all__ = ["Base", "KeyValueDocumentModel"]
