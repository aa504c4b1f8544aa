"""Quota management.

Access tokens and daily word quota

Every caller of the justification endpoint first obtains an access token.
The token is an opaque identifier bound to the caller's e-mail address and
it is the unit the word quota is accounted for.

Each token can justify a limited number of words per day. The day is a UTC
day: the accounting window ends at the first UTC midnight after it was
opened, so the very first window of a token may be shorter than 24 hours.

A request is admitted as long as it does not push the words used in the
current window over the daily limit. A request that would overshoot the
limit is refused as a whole, and the caller learns how many words are
still available so it can back off or split its text.
"""
