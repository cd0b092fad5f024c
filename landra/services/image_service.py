import logging
import mimetypes
import os
import uuid

from fastapi import UploadFile
from sqlalchemy.orm import Session

from landra.config import ALLOWED_IMAGE_TYPES, MAX_UPLOAD_SIZE, UPLOAD_DIR
from landra.database.models import Property, PropertyImage
from landra.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(self, upload_dir: str = UPLOAD_DIR):
        self.upload_dir = upload_dir

    async def save_uploaded_file(self, file: UploadFile, entity_id: int) -> tuple:
        """
        Save an uploaded image to the uploads directory

        Args:
            file: The uploaded file
            entity_id: ID of the property the image belongs to

        Returns:
            (path relative to the upload dir, original filename, size in bytes)

        Raises:
            ValidationError: If the file is missing, not an allowed image
                type, or larger than MAX_UPLOAD_SIZE
        """
        if file is None or not file.filename:
            raise ValidationError("No file provided")

        mime_type = file.content_type or mimetypes.guess_type(file.filename)[0]
        if mime_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError("Invalid file type. Only JPEG, PNG, and WebP are allowed.")

        content = await file.read()
        if len(content) > MAX_UPLOAD_SIZE:
            raise ValidationError(
                f"File too large. Maximum size is {MAX_UPLOAD_SIZE // (1024 * 1024)}MB."
            )

        _, ext = os.path.splitext(file.filename)
        directory = os.path.join(self.upload_dir, str(entity_id))
        os.makedirs(directory, exist_ok=True)

        stored_name = f"{uuid.uuid4().hex}{ext.lower()}"
        with open(os.path.join(directory, stored_name), "wb") as buffer:
            buffer.write(content)

        return f"{entity_id}/{stored_name}", file.filename, len(content)

    async def create_property_image(
        self, db: Session, property_id: int, file: UploadFile, owner_id: int
    ) -> PropertyImage:
        property_obj = (
            db.query(Property)
            .filter(Property.id == property_id, Property.owner_id == owner_id)
            .first()
        )
        if not property_obj:
            raise NotFoundError("Property not found or unauthorized")

        file_path, filename, size = await self.save_uploaded_file(file, property_id)

        image = PropertyImage(
            property_id=property_obj.id,
            image_path=file_path,
            filename=filename,
            size=size,
        )
        db.add(image)
        db.commit()
        db.refresh(image)
        logger.info("Stored image %s for property %s", file_path, property_id)
        return image

    def delete_property_image(self, db: Session, image_id: int, owner_id: int) -> bool:
        image = (
            db.query(PropertyImage)
            .join(Property, PropertyImage.property_id == Property.id)
            .filter(PropertyImage.id == image_id, Property.owner_id == owner_id)
            .first()
        )
        if not image:
            raise NotFoundError("Image not found or unauthorized")

        file_path = os.path.join(self.upload_dir, image.image_path)
        db.delete(image)
        db.commit()

        if os.path.exists(file_path):
            os.remove(file_path)
        return True
