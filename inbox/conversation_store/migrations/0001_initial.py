from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Conversation",
            fields=[
                ("conversation_id", models.BigAutoField(primary_key=True, serialize=False)),
                ("subject", models.CharField(blank=True, default="", max_length=255)),
                ("owner_id", models.CharField(max_length=255)),
                ("is_closed", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "inbox_conversations",
                "ordering": ["conversation_id"],
                "indexes": [
                    models.Index(fields=["owner_id"], name="idx_conversation_owner"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ConversationLabel",
            fields=[
                ("label_id", models.BigAutoField(primary_key=True, serialize=False)),
                ("owner_id", models.CharField(max_length=255)),
                ("label", models.CharField(max_length=80)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "inbox_conversation_labels",
                "ordering": ["owner_id", "label", "label_id"],
                "indexes": [
                    models.Index(fields=["owner_id"], name="idx_conv_label_owner"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ConversationParticipant",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("participant_id", models.CharField(max_length=255)),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                (
                    "conversation",
                    models.ForeignKey(
                        db_column="conversation_id",
                        on_delete=models.deletion.CASCADE,
                        related_name="participants",
                        to="inbox_conversation_store.conversation",
                    ),
                ),
            ],
            options={
                "db_table": "inbox_conversation_to_user",
                "ordering": ["conversation_id", "participant_id", "id"],
                "indexes": [
                    models.Index(fields=["participant_id"], name="idx_conv_participant"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("conversation", "participant_id"),
                        name="uq_conversation_participant",
                    ),
                ],
            },
        ),
    ]
