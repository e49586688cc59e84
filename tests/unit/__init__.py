"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_persistent_cache.py: TTL cache and storage fault handling
    - test_windowed_cache.py: Rolling payment window
    - test_payment_filter.py: Local search filter
    - test_sequenced_fetcher.py: Selection-key sequencing
    - test_read_through.py: Remote-first reads with cache fallback
    - test_config_loader.py: Configuration loading/validation
"""
