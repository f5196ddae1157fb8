"""Application layer: catalog building, security classification, policy queries."""
