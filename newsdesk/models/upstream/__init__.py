"""Response shapes of the upstream news APIs.

Only the fields the adapters read are modelled; anything else in the
payload is ignored.
"""
