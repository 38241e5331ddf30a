"""Mobile storage backed by SQLAlchemy (in-memory SQLite unless DATABASE_URL says otherwise)."""
from __future__ import annotations

from typing import FrozenSet, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from mobile_storage.db.create_tables import create_all
from mobile_storage.db.models import MobileRecord
from mobile_storage.db.session import build_engine, get_session
from mobile_storage.domain.mobiles import Mobile


def _entity_to_mobile(entity: MobileRecord) -> Mobile:
    return Mobile(imei=entity.imei, model=entity.model)


class SQLMobileRepository:
    """CRUD helpers wrapping the SQLAlchemy session.

    Each instance owns its engine and starts from an empty ``mobiles`` table,
    so re-creating the repository resets the registry.
    """

    def __init__(self, url: str | None = None, *, engine: Engine | None = None) -> None:
        self.engine = engine if engine is not None else build_engine(url)
        create_all(self.engine)
        self.clear()

    def list_mobiles(self) -> FrozenSet[Mobile]:
        with get_session(self.engine) as session:
            rows = session.execute(select(MobileRecord)).scalars().all()
            return frozenset(_entity_to_mobile(row) for row in rows)

    def find_by_imei(self, imei: str) -> Optional[Mobile]:
        with get_session(self.engine) as session:
            # No ORDER BY: with shared IMEIs the database picks the row.
            stmt = select(MobileRecord).where(MobileRecord.imei == imei).limit(1)
            entity = session.execute(stmt).scalars().first()
            return _entity_to_mobile(entity) if entity else None

    def contains(self, mobile: Mobile) -> bool:
        with get_session(self.engine) as session:
            return session.get(MobileRecord, (mobile.imei, mobile.model)) is not None

    def add(self, mobile: Mobile) -> bool:
        with get_session(self.engine) as session:
            session.add(MobileRecord(imei=mobile.imei, model=mobile.model))
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                return False
            return True

    def remove(self, mobile: Mobile) -> bool:
        with get_session(self.engine) as session:
            stmt = delete(MobileRecord).where(
                MobileRecord.imei == mobile.imei,
                MobileRecord.model == mobile.model,
            )
            result = session.execute(stmt)
            session.commit()
            return bool(result.rowcount)

    def count(self) -> int:
        with get_session(self.engine) as session:
            return int(session.execute(select(func.count()).select_from(MobileRecord)).scalar_one())

    def clear(self) -> None:
        with get_session(self.engine) as session:
            session.execute(delete(MobileRecord))
            session.commit()

    def close(self) -> None:
        self.engine.dispose()
