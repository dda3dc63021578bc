"""
Test suite for decimal-bignum

Contains:
- tests/unit/          : Unit and property tests for digits, parsing, BigNum, contracts
"""
