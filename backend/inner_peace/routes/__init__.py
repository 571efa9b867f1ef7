# Routes package init
"""
Inner Peace Backend — API Routes Package
=========================================

Route Inventory:
    - posts.py:    GET    /posts                       (list with suggestions)
                   POST   /posts                       (create post)
                   POST   /posts/{id}/suggestions      (create suggestion)
                   DELETE /posts/{id}?adminPassword=…  (delete post)
    - init_db.py:  *      /init-db                     (create tables if absent)
    - health.py:   GET    /health                      (liveness)

Routes stay thin: extract request data, call the service, pick the status
code. Anything unmatched falls through to the 404 handler in main.py.
"""
