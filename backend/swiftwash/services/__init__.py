"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- geo: City table and address-to-city/direction resolution (pure)
- sequence: Daily per-city counters with optimistic allocation
- order_ids: Order ID composition, parsing and the generation service
- addresses: Customer address lookup
- audit: Append-only log of generated order IDs
"""
