"""
Initial schema: Project and Lead.
"""

from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Featured", "Featured"),
                            ("Investment", "Investment"),
                            ("For Sale", "For Sale"),
                            ("Internal", "Internal"),
                        ],
                        default="Featured",
                        max_length=32,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("MVP", "MVP"),
                            ("Live", "Live"),
                            ("Beta", "Beta"),
                            ("Private", "Private"),
                            ("For Sale", "For Sale"),
                            ("Concept", "Concept"),
                        ],
                        default="Concept",
                        max_length=32,
                    ),
                ),
                ("hero_image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("demo_url", models.URLField(blank=True, max_length=500, null=True)),
                ("route", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "price",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True),
                ),
                (
                    "investment_amount",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True),
                ),
                (
                    "investment_received",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True),
                ),
                ("content", models.JSONField(blank=True, null=True)),
                ("key_features", models.JSONField(blank=True, null=True)),
                ("stats", models.JSONField(blank=True, null=True)),
                ("use_cases", models.JSONField(blank=True, null=True)),
                ("purchase_info", models.JSONField(blank=True, null=True)),
                ("is_public", models.BooleanField(default=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("priority_order", models.IntegerField(default=0)),
                ("lead_count", models.PositiveIntegerField(default=0)),
            ],
            options={
                "db_table": "project",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["category", "is_public"],
                        name="project_categor_3f5a1e_idx",
                    ),
                    models.Index(
                        fields=["is_public", "is_featured"],
                        name="project_is_publ_8c2d4b_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Lead",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("company", models.CharField(blank=True, max_length=255, null=True)),
                ("phone", models.CharField(blank=True, max_length=64, null=True)),
                (
                    "inquiry_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("demo", "Demo"),
                            ("investment", "Investment"),
                            ("purchase", "Purchase"),
                            ("contact", "Contact"),
                            ("partnership", "Partnership"),
                        ],
                        max_length=32,
                        null=True,
                    ),
                ),
                ("message", models.TextField(blank=True, null=True)),
                (
                    "source",
                    models.CharField(
                        choices=[
                            ("contact", "Contact"),
                            ("custom-build", "Custom Build"),
                            ("investor", "Investor"),
                            ("ai-agent", "AI Agent"),
                            ("website", "Website"),
                        ],
                        default="contact",
                        max_length=32,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("new", "New"),
                            ("contacted", "Contacted"),
                            ("qualified", "Qualified"),
                            ("converted", "Converted"),
                            ("closed", "Closed"),
                            ("archived", "Archived"),
                        ],
                        default="new",
                        max_length=32,
                    ),
                ),
                ("form_data", models.JSONField(blank=True, default=dict)),
                (
                    "project",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="leads",
                        to="core.project",
                    ),
                ),
            ],
            options={
                "db_table": "lead",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["project", "created_at"],
                        name="lead_project_6b1f0c_idx",
                    ),
                    models.Index(
                        fields=["status", "created_at"],
                        name="lead_status_2e9a7d_idx",
                    ),
                ],
            },
        ),
    ]
