"""
Service layer.

``store`` owns all database access; ``chat_service`` validates
requests and delegates to the store.  API handlers only talk to the
chat service.
"""
