from sqlalchemy import Column, Integer, String, CheckConstraint
from db.database import Base

class Plant(Base):
    """種のカタログ。common_name ごとに1行だけ"""
    __tablename__ = "plants"
    __table_args__ = (
        CheckConstraint("water_frequency > 0", name="ck_plants_water_frequency_positive"),
    )

    plant_id = Column(Integer, primary_key=True, autoincrement=True)
    common_name = Column(String, unique=True, nullable=False)
    water_frequency = Column(Integer, nullable=False)
