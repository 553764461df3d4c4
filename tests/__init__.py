"""
Test suite for meme-launcher

Contains:
- tests/unit/       : Unit tests for individual modules
- tests/scenarios/  : End-to-end launch and buy scenarios
"""
