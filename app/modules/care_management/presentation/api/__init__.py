# 📄 File: app/modules/care_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the reminder web endpoints.
# 🧪 Purpose (Technical Summary):
# Package for versioned care management API routers and their schemas.
# 🔗 Dependencies:
# v1, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
