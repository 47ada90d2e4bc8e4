# Repositories package init
"""
Employee List Backend — Storage Adapters
==========================================

What:  Thin wrappers around an AsyncSession exposing the store operations the
       service layer needs (find_all, find_by_id, insert, save, delete).
Why:   Keeps SQLAlchemy query construction out of the service, so the service
       can be unit-tested against a mocked adapter.
"""
