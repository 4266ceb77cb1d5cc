# 📄 File: app/modules/care_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The "requests" layer for care reminders: what someone can ask the app to do or show.
# 🧪 Purpose (Technical Summary):
# CQRS application layer (commands, queries, DTOs and handlers) over the ReminderService.
# 🔗 Dependencies:
# app.modules.care_management.domain
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation
