from sqlalchemy import Column, Integer, String, Text

from uptime_dashboard.core.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True, index=True)
    # Owner of the rule; the recipient lives in notificationUserId
    user_id = Column("userId", String, nullable=False, index=True)
    resource_id = Column("resourceId", String, nullable=False, index=True)
    notification_user_id = Column("notificationUserId", String, nullable=True)
    type = Column(String, nullable=False)
    conditions = Column(Text, nullable=True)
    is_active = Column("isActive", Integer, nullable=False, default=1)

    created_at = Column("createdAt", String, nullable=False, index=True)
    updated_at = Column("updatedAt", String, nullable=False)

    def __repr__(self):
        return f"<Notification(id={self.id}, type='{self.type}')>"
