"""
Pydantic schema definitions for API payloads and stored records.

Each entity defines a ``*Create`` model for untrusted input and a
``*Read`` model for the stored record.  ``validation`` turns raw
request data into a ``*Create`` model or a list of field errors.
"""
