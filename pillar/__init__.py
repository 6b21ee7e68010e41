"""
Pillar: a tiny postfix stack language with deferred blocks.
"""
