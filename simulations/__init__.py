# simulations/__init__.py
"""
Analysis tools built on the monty_hall package.

Plot convergence via:
    python -m simulations.convergence -n ... --seed ... --every ...
"""
