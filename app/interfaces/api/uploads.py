"""Upload API routes — image uploads for events, news and author avatars."""

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.core.exceptions import BadRequestException
from app.domain.models.user import User
from app.infrastructure.media_storage import IMAGE_EXTENSIONS, MEDIA_FOLDERS, MediaStorage
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_media_storage

router = APIRouter(prefix="/api/uploads", tags=["Uploads"])


@router.post("/{folder}", status_code=status.HTTP_201_CREATED)
async def upload_image(
    folder: str,
    file: UploadFile = File(...),
    storage: MediaStorage = Depends(get_media_storage),
    admin: User = Depends(require_admin),
):
    if folder not in MEDIA_FOLDERS:
        raise BadRequestException(f"Unknown upload folder: {folder}", {"allowed": list(MEDIA_FOLDERS)})
    if not file.filename:
        raise BadRequestException("No file provided")

    ext = file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else ""
    if ext not in IMAGE_EXTENSIONS:
        raise BadRequestException("Only image files are accepted", {"allowed": list(IMAGE_EXTENSIONS)})

    content = await file.read()
    url = storage.save(folder, file.filename, content)
    return {"url": url}
