"""Owner classification and normalization engine.

Leaves first: ``classifier`` (company vs person), ``splitter`` (joint
owners and surname hints), ``name_parser`` (first / middle / last),
``canonical`` (identity keys and dedup), ``history`` (date buckets),
``invalid`` (rejected segments) and ``engine``, which runs them in order
for one source record.
"""
