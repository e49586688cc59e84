"""
Integration Tests - Client Online/Offline Flows.

These tests wire the full client with in-memory storage, a frozen
clock and a FakeTransport that can be switched offline.

Test Files:
    - test_offline_flow.py: Search, read-through, mutations, logout
"""
