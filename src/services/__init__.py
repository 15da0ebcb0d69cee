"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.

- normalizer: raw imported row -> catalog entry
- catalog_importer: bulk CSV import and its report
- catalog: manual add/edit, deletion, search and filters
- lookup: metadata prefill for the manual add flow
"""
