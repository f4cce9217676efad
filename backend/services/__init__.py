"""
Service layer: renter sessions, manager queries and fleet loading.
"""
