# 📄 File: app/modules/care_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules for care reminders - what a reminder is and how its dates are worked out.
# 🧪 Purpose (Technical Summary):
# Domain layer containing the Reminder entity, the pure scheduler, the lifecycle service,
# repository and registrar interfaces, and domain events.
# 🔗 Dependencies:
# Domain models, services, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, Infrastructure layer, Presentation layer
