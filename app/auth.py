"""
Request identity.

Authentication happens at the gateway in front of this service, which forwards
the authenticated user's ID in the X-User-Id header.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from .database import get_db
from .models import User

logger = logging.getLogger(__name__)


async def get_current_user(
    x_user_id: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the calling user from the gateway identity header"""
    if not x_user_id:
        logger.warning("Request without X-User-Id header")
        raise HTTPException(status_code=401, detail="Not authenticated")

    user = db.query(User).filter(User.id == x_user_id).first()
    if not user:
        logger.warning(f"Unknown user in X-User-Id header: {x_user_id}")
        raise HTTPException(status_code=401, detail="User not found")

    return user
