from sqlalchemy import Column, String, Text

from uptime_dashboard.core.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, index=True)
    user_id = Column("userId", String, nullable=False, index=True)
    resource_id = Column("resourceId", String, nullable=False, index=True)
    check_id = Column("checkId", String, nullable=False, index=True)
    type = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    details = Column(Text, nullable=True)
    timestamp = Column(String, nullable=False, index=True)

    def __repr__(self):
        return f"<Event(id={self.id}, type='{self.type}')>"
