"""Run with: python -m simplecalc"""
from simplecalc.main import main

main()
