# base_counter/domains/auth/models.py
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from base_counter.core.database import Base
from base_counter.shared.database.mixins import TimestampMixin


class UsedAuthKey(Base, TimestampMixin):
    __tablename__ = "used_auth_keys"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    fused_key: Mapped[str] = mapped_column(String, unique=True, index=True)
    random_string: Mapped[str] = mapped_column(String)
    ip_address: Mapped[str] = mapped_column(String, default="unknown")
    used_at: Mapped[datetime] = mapped_column(DateTime, index=True)
