import os
import uuid
from datetime import datetime, timezone
from flask import current_app
from werkzeug.security import safe_join
from werkzeug.utils import secure_filename
from emusite.domain.exceptions import InvariantViolation

UPLOAD_URL_PREFIX = "/uploads"

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
ALLOWED_VIDEO_TYPES = {"video/mp4", "video/webm", "video/quicktime"}


def file_size(file):
    """Size of an uploaded FileStorage without reading it into memory."""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def validate_upload(file, *, allowed_types=None, image_only=False, max_size=None):
    if file is None or not file.filename:
        raise InvariantViolation("No file uploaded", field="file")

    mime_type = file.mimetype or ""

    if image_only and not mime_type.startswith("image/"):
        raise InvariantViolation("Only image files are allowed", field="file")

    if allowed_types is not None and mime_type not in allowed_types:
        raise InvariantViolation(
            "Invalid file type. Allowed types: " + ", ".join(sorted(allowed_types)),
            field="file",
        )

    size = file_size(file)
    limit = max_size or current_app.config["MAX_UPLOAD_SIZE"]
    if size > limit:
        raise InvariantViolation(
            f"File size exceeds limit of {limit // (1024 * 1024)}MB",
            field="file",
        )

    return size


def save_file(file, *, suffix=None):
    """
    Store an upload under UPLOAD_FOLDER/<YYYY>/<MM>/<unique>-<name>.

    Returns the public URL path ("/uploads/2025/01/ab12cd-name.png"),
    the stored size in bytes and the client-declared MIME type.
    """
    filename = secure_filename(file.filename) or "file"
    if suffix:
        stem, ext = os.path.splitext(filename)
        filename = f"{stem}-{suffix}{ext}"

    now = datetime.now(timezone.utc)
    relative_dir = f"{now.year}/{now.month:02d}"
    unique_filename = f"{uuid.uuid4().hex[:12]}-{filename}"

    upload_folder = current_app.config["UPLOAD_FOLDER"]
    target_dir = os.path.join(upload_folder, now.strftime("%Y"), now.strftime("%m"))
    os.makedirs(target_dir, exist_ok=True)

    size = file_size(file)
    file.save(os.path.join(target_dir, unique_filename))

    current_app.logger.info("Stored upload %s (%d bytes)", unique_filename, size)

    return {
        "path": f"{UPLOAD_URL_PREFIX}/{relative_dir}/{unique_filename}",
        "size": size,
        "mime_type": file.mimetype,
    }


def upload_path(file_url):
    """
    Filesystem path of a stored upload given its "/uploads/..." URL,
    or None when the URL points outside the upload folder.
    """
    if not file_url or not file_url.startswith(UPLOAD_URL_PREFIX + "/"):
        return None

    relative = file_url[len(UPLOAD_URL_PREFIX) + 1:]
    return safe_join(current_app.config["UPLOAD_FOLDER"], relative)


def delete_file(file_url):
    """
    Deletes a stored upload given its URL.
    Returns True when a file was removed.
    """
    file_path = upload_path(file_url)
    if not file_path or not os.path.exists(file_path):
        return False

    try:
        os.remove(file_path)
        return True
    except OSError as e:
        current_app.logger.error(f"Failed to delete file {file_path}: {e}")
        return False


def absolute_url(url):
    """Prefix relative media URLs with PUBLIC_BASE_URL."""
    if not url or url.startswith(("http://", "https://")):
        return url

    base_url = current_app.config.get("PUBLIC_BASE_URL", "").rstrip("/")
    return f"{base_url}/{url.lstrip('/')}"
