"""Form definition for creating and editing articles."""

from django import forms

from .models import Article


class ArticleForm(forms.ModelForm):
    """Title and description inputs; length rules come from the model validators."""

    class Meta:
        model = Article
        fields = ["title", "description"]
        labels = {
            "title": "Title",
            "description": "Description",
        }
        widgets = {
            "title": forms.TextInput(attrs={
                "placeholder": "Enter article title",
                "class": "form-control",
            }),
            "description": forms.Textarea(attrs={
                "placeholder": "Enter article description",
                "class": "form-control",
                "rows": 8,
            }),
        }
        error_messages = {
            "title": {
                "required": "Title is required",
                "max_length": "Title cannot be longer than %(limit_value)d characters",
            },
            "description": {
                "required": "Description is required",
            },
        }


__all__ = ["ArticleForm"]
