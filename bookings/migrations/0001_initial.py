import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=100)),
                ("slug", models.CharField(max_length=100)),
                ("description", models.TextField()),
                ("overview", models.TextField()),
                ("image", models.TextField()),
                ("venue", models.TextField()),
                ("location", models.TextField()),
                ("date", models.CharField(max_length=10)),
                ("time", models.CharField(max_length=5)),
                (
                    "mode",
                    models.CharField(
                        choices=[
                            ("online", "online"),
                            ("offline", "offline"),
                            ("hybrid", "hybrid"),
                        ],
                        max_length=7,
                    ),
                ),
                ("audience", models.TextField()),
                ("agenda", models.JSONField(default=list)),
                ("organizer", models.TextField()),
                ("tags", models.JSONField(default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["date", "mode"], name="event_date_mode_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("slug",), name="event_slug_unique"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("event_id", models.UUIDField()),
                ("email", models.CharField(max_length=254)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["email"], name="booking_email_idx"),
                    models.Index(
                        fields=["event_id", "created_at"],
                        name="booking_event_created_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("event_id", "email"),
                        name="booking_event_email_unique",
                    ),
                ],
            },
        ),
    ]
