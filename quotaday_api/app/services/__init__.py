"""
Service layer.

The quote store and the code turning quotations into responses live
here, independent of the HTTP routes that use them.
"""
