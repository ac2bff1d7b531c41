"""
Hindley-Milner type inference with let-polymorphism, using levels and holes.
"""
