"""
Unit Tests for the Ataxx Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_board.py

    # Run with coverage
    pytest tests/ --cov=ataxx_engine --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestFindBestMove::test_finds_biggest_capture

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
