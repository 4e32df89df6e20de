from sqlalchemy import Column, Integer, String, Text

from uptime_dashboard.core.database import Base


class Check(Base):
    __tablename__ = "checks"

    id = Column(String, primary_key=True, index=True)
    user_id = Column("userId", String, nullable=False, index=True)
    # No foreign key: joins against resources degrade to "Unknown" instead
    resource_id = Column("resourceId", String, nullable=False, index=True)
    test_type = Column("testType", String, nullable=True)
    name = Column(String, nullable=False)
    title = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)
    criteria = Column(Text, nullable=True)
    schedule = Column(String, nullable=False)
    is_active = Column("isActive", Integer, nullable=False, default=1)

    created_at = Column("createdAt", String, nullable=False, index=True)
    updated_at = Column("updatedAt", String, nullable=False)

    def __repr__(self):
        return f"<Check(id={self.id}, name='{self.name}')>"
