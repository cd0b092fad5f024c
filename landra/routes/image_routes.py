import logging

from fastapi import APIRouter, UploadFile, File, Depends
from sqlalchemy.orm import Session

from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.schemas.image_response import PropertyImageResponse
from landra.services.errors import LandraError
from landra.services.image_service import ImageService
from landra.utils.dependencies import get_current_user
from landra.responses.error import error_response, internal_server_error
from landra.responses.success import created_response, empty_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["Images"])

image_service = ImageService()


@router.post("/property/{property_id}", response_model=PropertyImageResponse, status_code=201)
async def upload_property_image(
    property_id: int,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        image = await image_service.create_property_image(
            db, property_id, file, current_user.id
        )
        return created_response(PropertyImageResponse.model_validate(image))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("File upload failed for property %s", property_id)
        return internal_server_error("File upload failed")


@router.delete("/property/image/{image_id}")
def delete_property_image(
    image_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a property image

    Args:
        image_id: ID of the image to delete
    """
    try:
        image_service.delete_property_image(db, image_id, current_user.id)
        return empty_response()
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to delete image %s", image_id)
        return internal_server_error("Failed to delete image")
