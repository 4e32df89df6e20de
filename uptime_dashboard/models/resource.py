from sqlalchemy import Column, Integer, String, Text

from uptime_dashboard.core.database import Base


class Resource(Base):
    __tablename__ = "resources"

    id = Column(String, primary_key=True, index=True)
    user_id = Column("userId", String, nullable=False, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=True, index=True)
    # JSON encoded list of labels
    tags = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="offline")
    last_checked = Column("lastChecked", String, nullable=True)
    response_time = Column("responseTime", Integer, nullable=False, default=0)
    assigned_user_id = Column("assignedUserId", String, nullable=True)

    created_at = Column("createdAt", String, nullable=False, index=True)
    updated_at = Column("updatedAt", String, nullable=False)

    def __repr__(self):
        return f"<Resource(id={self.id}, name='{self.name}')>"
