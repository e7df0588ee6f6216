"""Nutrient model and food catalog."""
