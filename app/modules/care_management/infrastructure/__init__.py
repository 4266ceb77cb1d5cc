# 📄 File: app/modules/care_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where care reminders meet real storage and the alert list phones download.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy persistence and the scheduled-alert registrar.
# 🔗 Dependencies:
# SQLAlchemy, app.shared.infrastructure.database
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, background jobs, migrations
