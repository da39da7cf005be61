# invoicing/repositories/users.py

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from invoicing.core.errors import EmailTaken
from invoicing.db.engine import is_unique_violation
from invoicing.db.schema import users
from invoicing.models.users import UserRecord
from invoicing.repositories.rows import new_id, row_to_user, utcnow


class UserRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, email: str, password_hash: str, name: str) -> UserRecord:
        now = utcnow()
        values = {
            "id": new_id(),
            "email": email,
            "password_hash": password_hash,
            "name": name,
            "created_at": now,
            "updated_at": now,
        }

        try:
            with self.engine.begin() as conn:
                conn.execute(insert(users).values(**values))
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise EmailTaken() from exc
            raise

        return UserRecord(**values)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        with self.engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.email == email)).mappings().first()
        return row_to_user(row) if row is not None else None

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self.engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).mappings().first()
        return row_to_user(row) if row is not None else None
