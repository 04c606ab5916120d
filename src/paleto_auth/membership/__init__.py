"""
paleto_auth.membership

Membership resolution package.

Responsibilities:
- Define the `MembershipResolver` interface.
- Guild-role and spreadsheet implementations, selected once at startup.
"""

# Package marker; resolvers are imported directly from submodules.
