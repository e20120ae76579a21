"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between API Layer and external collaborators.

Contains:
    - Application services (CVUploadUseCase)
    - Ports (Protocols implemented by Infrastructure Layer)

Does NOT contain:
    - HTTP handling (belongs to API layer)
    - Infrastructure details (belongs to Infrastructure layer)
"""
