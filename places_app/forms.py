"""
places_app/forms.py

Flask-WTF forms for the place pages. Every POST form carries the CSRF token.
"""

from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField, FileRequired
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length

IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "gif", "webp", "avif", "bmp", "svg"]


class PlaceForm(FlaskForm):
    title = StringField("Title", validators=[DataRequired(), Length(max=200)])
    image = FileField(
        "Image",
        validators=[FileRequired(), FileAllowed(IMAGE_EXTENSIONS, "Images only.")],
    )
    submit = SubmitField("Add place")


class PlaceEditForm(FlaskForm):
    title = StringField("Title", validators=[DataRequired(), Length(max=200)])
    # Leaving the image empty keeps the current one
    image = FileField("New image (optional)", validators=[FileAllowed(IMAGE_EXTENSIONS, "Images only.")])
    submit = SubmitField("Save")


class DeleteForm(FlaskForm):
    submit = SubmitField("Delete")
