from sqlalchemy import Column, Integer, String

from ers.core.database import Base


class UserModel(Base):
    __tablename__ = "ers_users"

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)

    # "admin" | "manager" | "employee"
    role = Column(String, nullable=False, default="employee")

    password_hash = Column(String, nullable=False)
