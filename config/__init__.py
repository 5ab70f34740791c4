"""Configuration for the payroll calculators and scripts."""
