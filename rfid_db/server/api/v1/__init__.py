"""
Routers for the RFID database API.

- root: welcome message
- health: liveness and version probes
- users, weapons, access_log: create and list endpoints per table
"""
