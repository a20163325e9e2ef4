"""Client-side inference pipeline for an external compute host."""
