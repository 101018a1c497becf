import logging

from sqlalchemy.orm import Session

from db.database import upsert, storage_guard
from errors import ValidationError
from models.user import User

logger = logging.getLogger("garden.users")


def bootstrap(db: Session, subject_id: str, name: str | None, email: str | None) -> User:
    """
    検証済みの (sub, name, email) からユーザーを返す。初回なら作成する

    INSERT ... ON CONFLICT (user_id) DO UPDATE の1文で行うので、
    同じ sub で同時にログインしても行は1つにまとまる。
    既存ユーザーは name / email だけ最新の値に更新し、paid は触らない。
    """
    if not subject_id:
        raise ValidationError("Missing required field: subject_id")

    stmt = upsert(db, User).values(user_id=subject_id, name=name, email=email, paid=False)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id"],
        set_={"name": stmt.excluded.name, "email": stmt.excluded.email},
    )

    with storage_guard(db, "authenticate user"):
        user = db.scalars(
            stmt.returning(User),
            execution_options={"populate_existing": True},
        ).one()
        db.commit()
        db.refresh(user)

    logger.info("user bootstrapped: %s", user.user_id)
    return user

