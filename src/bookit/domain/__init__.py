"""Domain layer for bookit application.

Services are imported from their modules (``bookit.domain.booking_template``
and friends) so that the database layer can import entities without pulling
in the services that depend on it.
"""
