# Routes package init
"""
Employee List Backend — API Routes Package
============================================

Route Inventory:
    - employees.py: GET/POST/PUT /api/employeelist
                    GET/DELETE   /api/employeelist/{id}
    - health.py:    GET /health
    - frontend.py:  GET /  (+ static bundle mount)

Routes stay thin: extract input, call the service, return the result.
"""
