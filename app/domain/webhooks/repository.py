"""Webhook repository - Lookups for registered notification targets"""

from sqlalchemy.orm import Session

from ...models import User, Webhook


class WebhookRepository:
    """Repository for webhook lookups"""

    @staticmethod
    def find_by_event_type(db: Session, event_type: str) -> list[Webhook]:
        """Get all webhooks registered for an event type"""
        return (
            db.query(Webhook)
            .filter(Webhook.event_type == event_type)
            .order_by(Webhook.created_at.asc())
            .all()
        )

    @staticmethod
    def find_by_user(db: Session, user: User) -> list[Webhook]:
        """Get all webhooks owned by a user, regardless of event type"""
        return (
            db.query(Webhook)
            .filter(Webhook.user_id == user.id)
            .order_by(Webhook.created_at.asc())
            .all()
        )
