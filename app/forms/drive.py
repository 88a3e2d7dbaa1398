from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import DataRequired, Length, Optional


class CreateFolderForm(FlaskForm):
    name = StringField('Folder Name', validators=[
        DataRequired(message='Folder name is required'),
        Length(max=255)
    ])
    parent_id = StringField('Parent Folder', validators=[Optional(), Length(max=64)])


class RenameFolderForm(FlaskForm):
    name = StringField('New Name', validators=[
        DataRequired(message='Folder name is required'),
        Length(max=255)
    ])


class MoveFolderForm(FlaskForm):
    target_id = StringField('Destination Folder', validators=[
        DataRequired(message='No destination folder selected'),
        Length(max=64)
    ])


class RemarksForm(FlaskForm):
    file_id = StringField('File ID', validators=[DataRequired(message='File ID is required'), Length(max=64)])
    file_name = StringField('File Name', validators=[Optional(), Length(max=255)])
    file_type = StringField('File Type', validators=[Optional(), Length(max=255)])
    parent_folder_id = StringField('Parent Folder ID', validators=[Optional(), Length(max=64)])
    folder_path = StringField('Folder Path', validators=[Optional()])
    remarks = StringField('Remarks', validators=[Optional()])


def first_error(form: FlaskForm) -> str:
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return 'Invalid request'
