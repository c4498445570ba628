"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders follow the feature areas: communities, users, spaces, channels,
posts, comments, versions, courses, lessons, progress, certificates,
payment_tiers, coupons, checkout, subscriptions, access, notifications,
search.
"""
