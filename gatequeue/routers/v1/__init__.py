"""v1 router package — all /api/v1/* endpoints live here.

Files:
  drivers.py  — check-in, queue views, status transitions
  gates.py    — gate configuration and queue number preview
  checkin.py  — form helpers (geofence, PO number, plate) and the wizard
  logs.py     — activity log
  store.py    — generic record store for the dashboard

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to gatequeue/services/.
"""
