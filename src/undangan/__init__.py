"""Undangan — wedding invitation management backend.

Accounts, weddings, digital invitations, guests, RSVPs, galleries,
love stories, gift accounts and wishes, every resource scoped to the
user who owns the wedding it hangs off.
"""

__version__ = "0.1.0"
