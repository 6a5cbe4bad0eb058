"""Services package — all business logic lives here, never in routers.

Files:
  queue.py           — driver queue state machine (check-in and every transition)
  views.py           — operator views, search, queue numbers (pure functions)
  gates.py           — gate configuration
  activity.py        — append-only activity log
  notifier.py        — WhatsApp gateway client
  messages.py        — notification texts
  documents.py       — delivery-order photo storage
  geofence.py        — warehouse radius check
  checkin_form.py    — PO number, PIC and licence plate helpers
  checkin_wizard.py  — step-by-step check-in form
  store.py           — generic record store adapter

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
