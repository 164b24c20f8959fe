"""Stripe payment failure monitor.

Declaring ``app`` as a regular package keeps it from resolving to an unrelated
namespace package installed in the environment.
"""
