import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Article",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "title",
                    models.CharField(
                        error_messages={
                            "blank": "Title is required",
                            "max_length": "Title cannot be longer than %(limit_value)d characters",
                            "required": "Title is required",
                        },
                        max_length=255,
                        validators=[
                            django.core.validators.MinLengthValidator(
                                3, message="Title must be at least %(limit_value)d characters"
                            )
                        ],
                    ),
                ),
                (
                    "description",
                    models.TextField(
                        error_messages={
                            "blank": "Description is required",
                            "required": "Description is required",
                        },
                        validators=[
                            django.core.validators.MinLengthValidator(
                                10, message="Description must be at least %(limit_value)d characters"
                            )
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(editable=False, null=True)),
                ("updated_at", models.DateTimeField(editable=False, null=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
