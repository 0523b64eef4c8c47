"""
High-level use cases for the GYMBot API.

Services orchestrate the storage accessor to implement the exercise rules
(id assignment, filtering, grouping). Routers call these services instead of
reading or writing the JSON file directly.
"""
