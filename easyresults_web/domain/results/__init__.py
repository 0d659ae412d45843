"""
Results bounded context: domain layer.

This module contains all domain logic for result handling:
- Outcome value and status enumeration
- Status category classification and transport code mapping
- Ordered, first-match-wins result dispatching
"""
