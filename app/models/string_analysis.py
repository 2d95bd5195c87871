from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text
from sqlalchemy.dialects import mysql
from app.database import Base

# value is looked up and deleted by exact match; MySQL's default collation
# would ignore case and accents
ExactText = Text().with_variant(mysql.TEXT(collation="utf8mb4_bin"), "mysql", "mariadb")


class StringAnalysis(Base):
    __tablename__ = "string_analyses"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # storage order
    id = Column(String(64), nullable=False, unique=True, index=True)  # SHA-256 hash
    value = Column(ExactText, nullable=False)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    sha256_hash = Column(String(64), nullable=False)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
