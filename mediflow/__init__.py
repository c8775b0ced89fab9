"""
MediFlow Backend API
"""
