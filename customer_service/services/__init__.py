# Services package init
"""
Customer Service - Use Case Layer
==================================

What:  Business layer sitting between routes (HTTP) and repositories
       (persistence).
How:   Use cases receive a repository and expose business-facing
       operations. They are injected into routes via FastAPI's dependency
       injection.

Service Inventory:
    - CustomerUseCase (abstract): GetAllCustomer / FindCustomerById /
      RegisterCustomer
    - CustomerUseCaseImpl: delegates each operation to a CustomerRepository
"""
