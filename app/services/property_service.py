import logging

from sqlalchemy.orm import Session

from app.core.result import Result, ErrorCode, failure
from app.models.profile import Profile
from app.models.property import Property, PropertyStatus
from app.repositories.property_repository import PropertyRepository
from app.schemas.property_schemas import PropertyCreate

logger = logging.getLogger(__name__)


class PropertyService:
    """Service for listing submission and moderation"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PropertyRepository(db)

    def list_properties(self, status: PropertyStatus | None = None) -> Result[list[Property]]:
        """List properties, newest first, optionally by moderation status"""
        return self.repo.list_all(status)

    def set_status(self, property_id: int, status: PropertyStatus) -> Result[Property]:
        """Approve, reject or re-queue a listing"""
        found = self.repo.get_by_id(property_id)
        if not found.is_ok:
            return found
        property = found.value
        if property is None:
            return failure(ErrorCode.NOT_FOUND, "Property not found", property_id=property_id)

        property.status = status
        logger.info("Property %s moderated to %s", property_id, status.value)
        return self.repo.update(property)

    def submit_listing(self, data: PropertyCreate, submitted_by: Profile) -> Result[Property]:
        """
        Create a listing awaiting moderation.

        The listing always starts PENDING, whatever the submitter's role.
        """
        property = Property(**data.model_dump(), status=PropertyStatus.PENDING)
        result = self.repo.create(property)
        if result.is_ok:
            logger.info(
                "Listing %s submitted by %s",
                result.value.id,
                submitted_by.id,
                extra={"property_id": result.value.id},
            )
        return result
