from datetime import datetime
import uuid
from ..extensions import db


def new_item_id() -> str:
    return uuid.uuid4().hex


# A node may sit in more than one folder, so parent links are many-to-many.
folder_parents = db.Table(
    'folder_parents',
    db.Column('folder_id', db.String(64), db.ForeignKey('folders.id', ondelete='CASCADE'), primary_key=True),
    db.Column('parent_id', db.String(64), db.ForeignKey('folders.id', ondelete='CASCADE'), primary_key=True),
    db.Column('linked_at', db.DateTime, default=datetime.utcnow)
)

file_parents = db.Table(
    'file_parents',
    db.Column('file_id', db.String(64), db.ForeignKey('files.id', ondelete='CASCADE'), primary_key=True),
    db.Column('folder_id', db.String(64), db.ForeignKey('folders.id', ondelete='CASCADE'), primary_key=True),
    db.Column('linked_at', db.DateTime, default=datetime.utcnow)
)


class Folder(db.Model):
    __tablename__ = 'folders'

    id = db.Column(db.String(64), primary_key=True, default=new_item_id)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    parents = db.relationship(
        'Folder',
        secondary=folder_parents,
        primaryjoin=id == folder_parents.c.folder_id,
        secondaryjoin=id == folder_parents.c.parent_id,
        order_by=folder_parents.c.linked_at,
        backref=db.backref('children', lazy='dynamic')
    )

    def __init__(self, name: str, id: str = None) -> None:
        self.id = id or new_item_id()
        self.name = name

    def __repr__(self) -> str:
        return f'<Folder {self.id}: {self.name}>'


class File(db.Model):
    __tablename__ = 'files'

    id = db.Column(db.String(64), primary_key=True, default=new_item_id)
    name = db.Column(db.String(255), nullable=False)
    mime_type = db.Column(db.String(255), nullable=False, default='application/octet-stream')
    size = db.Column(db.BigInteger, nullable=False, default=0)
    file_path = db.Column(db.String(1024), nullable=True)  # Content location on local disk
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    parents = db.relationship(
        'Folder',
        secondary=file_parents,
        order_by=file_parents.c.linked_at,
        backref=db.backref('files', lazy='dynamic')
    )

    def __init__(self, name: str, mime_type: str = 'application/octet-stream', size: int = 0,
                 file_path: str = None, updated_at: datetime = None, id: str = None) -> None:
        self.id = id or new_item_id()
        self.name = name
        self.mime_type = mime_type
        self.size = size
        self.file_path = file_path
        if updated_at is not None:
            self.updated_at = updated_at

    def __repr__(self) -> str:
        return f'<File {self.id}: {self.name}>'
