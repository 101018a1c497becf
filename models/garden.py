from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Uuid
from db.database import Base
from schemas.garden import Health
import uuid
from datetime import datetime

class GardenEntry(Base):
    __tablename__ = "garden"

    entry_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False, index=True)

    # 同じ種を何個持ってもいい（user_id, plant_id にユニーク制約は付けない）
    plant_id = Column(Integer, ForeignKey("plants.plant_id"), nullable=False)

    watered_count = Column(Integer, nullable=False, default=0)
    health = Column(String, nullable=False, default=Health.POOR.value)
    created_at = Column(DateTime, default=datetime.utcnow)
