"""Flight search restricted to pole-vault-friendly airlines."""
