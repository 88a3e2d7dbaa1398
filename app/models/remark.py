from ..extensions import db
from ..utils.file_utils import utc_isoformat

# Column order of the remarks table as it is exported.
REMARKS_HEADER = [
    'File ID', 'File Name', 'File Type', 'Parent Folder ID',
    'Folder Path', 'Remarks', 'Last Modified', 'File URL'
]


class FileRemark(db.Model):
    """
    One row per file carrying its remark plus a denormalized copy of the
    file's metadata at the time the remark was saved.
    """
    __tablename__ = 'file_remarks'

    row = db.Column(db.Integer, primary_key=True)  # Insertion order, kept on update
    file_id = db.Column(db.String(64), unique=True, index=True)
    file_name = db.Column(db.String(255))
    file_type = db.Column(db.String(255))
    parent_folder_id = db.Column(db.String(64))
    folder_path = db.Column(db.Text)
    remarks = db.Column(db.Text)
    last_modified = db.Column(db.DateTime)
    file_url = db.Column(db.String(1024))

    def to_row(self) -> list:
        return [
            self.file_id,
            self.file_name,
            self.file_type,
            self.parent_folder_id,
            self.folder_path,
            self.remarks or '',
            utc_isoformat(self.last_modified) or '',
            self.file_url
        ]

    def __repr__(self) -> str:
        return f'<FileRemark {self.row}: {self.file_id}>'
