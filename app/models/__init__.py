from app.models.file import Folder, File, folder_parents, file_parents
from app.models.remark import FileRemark, REMARKS_HEADER
from app.models.access import AllowedEmail, normalize_email
