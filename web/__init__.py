"""
Web view for Daily Quotes.
"""
