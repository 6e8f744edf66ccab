"""
Pizza ordering demo — classic REST vs HATEOAS.

Two FastAPI apps share one order lifecycle (``pizza_demo.shared``):

  ┌───────────────────┐      ┌──────────────────────┐
  │ rest   (:3000)    │─────▶│                      │
  │ bare JSON payload │      │  shared              │
  └───────────────────┘      │  OrderStore          │
  ┌───────────────────┐      │  OrderProgression    │
  │ hateoas (:3001)   │─────▶│  commands            │
  │ payload + links   │      │                      │
  └───────────────────┘      └──────────────────────┘
"""

__version__ = "1.0.0"
