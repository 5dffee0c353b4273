# Routes package init
"""
Customer Service - API Routes Package
======================================

Route Inventory:
    - customer.py:  GET  /customer         (list all customers)
                    GET  /customer/{id}    (get one customer)
                    POST /customer         (register a customer)
    - health.py:    GET  /health           (service health check)

Routes are thin: they bind the request, call the use case and return the
result. Error responses come from the global handlers in main.py.
"""
