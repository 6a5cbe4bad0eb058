"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base, ActorRequest, HealthResponse (all schemas inherit CamelModel)
  driver.py    — check-in request, transition bodies, DriverOut
  gate.py      — gate configuration and queue number preview
  checkin.py   — form helpers and wizard state
  activity.py  — activity log entries
  store.py     — generic record store request
"""
