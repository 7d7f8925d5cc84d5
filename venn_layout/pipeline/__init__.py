"""Pipeline stages — data, circles, placer, with the SAT engine underneath.

Each stage reads the previous stage's output.  The stages in order:

  data     parse and validate the categories/organizations document
  circles  fix one circle per category
  placer   choose organization dots and circle labels (SAT encoding)

The sat package is a generic CNF oracle with no knowledge of geometry.
"""
