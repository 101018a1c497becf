from sqlalchemy import Column, String, Boolean, DateTime
from db.database import Base
from datetime import datetime

class User(Base):
    __tablename__ = "users"

    # IdP の sub をそのまま主キーにする
    user_id = Column(String, primary_key=True)
    name = Column(String)
    email = Column(String)
    paid = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
