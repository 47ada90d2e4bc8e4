# Services package init
"""
Employee List Backend — Services Layer
========================================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - EmployeeService: list / read / create / update / delete employees,
      translating missing records and driver errors into app exceptions
"""
