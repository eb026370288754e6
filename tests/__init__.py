"""
Test suite for the production scheduling engine.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_blend_schedule_service.py -v
"""
