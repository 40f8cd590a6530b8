"""RFID Database Application.

A small asynchronous HTTP service that records personnel (users), the weapons
issued to them and an append-only access log, each identified by an RFID tag
number.

Subpackages
-----------

- ``rfid_db.core``: logging, database engine/session management, table
  entities, repositories and the request/response models.
- ``rfid_db.server``: the FastAPI application, its configuration, routers and
  exception handlers.

Run the server with ``python -m rfid_db.server``.
"""

__version__ = "1.0.0"
