"""Nutrient requirement derivation from health profiles."""
