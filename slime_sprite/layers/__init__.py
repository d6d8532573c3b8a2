"""Fragment generators, one module per visual concern.

Generators are pure functions of the derived sprite state. Those that need
definitions (gradients, filters, clip paths) return a
:class:`~slime_sprite.document.Fragment`; the rest return plain markup.
"""
