from ninja import File
from ninja.files import UploadedFile
from ninja_extra import api_controller, route

from common import models
from common.authentication import MeetappJWTAuth
from common.schema import UploadedFileSchema
from common.throttling import UploadThrottle
from common.utils import save_uploaded_file

from .base import UserAwareController


@api_controller("/files", auth=MeetappJWTAuth(), tags=["Files"], throttle=UploadThrottle())
class FileController(UserAwareController):
    @route.post("", url_name="upload_file", response=UploadedFileSchema)
    def upload_file(self, file: File[UploadedFile]) -> models.File:
        """Upload a file to be used as a meetup banner.

        Send the file as multipart form data under the `file` field. The returned `id` is what
        `banner_id` refers to when creating or editing a meetup.
        """
        return save_uploaded_file(file=file, uploader=self.user())
