"""Hospital Abstract Factory.

Two hospital families (Field and Capital), each made of a matching
building and staff product, assembled through an abstract factory.
"""
