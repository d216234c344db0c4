sql_primer = """
# SQL Basics with a Public Health Dataset

## Tables
- A relational database stores data in **tables** (also called relations).
- A table is two-dimensional: every **row** (tuple) describes one thing, every
  **column** (attribute) holds one property of it, with a name and a type.
- In this tutorial each row of `health` describes one place in the world and its
  health indicators; each row of `locations` tells us what that place is called.

## SQL
- SQL is the language used to ask a database questions. A query describes *what*
  you want, the database engine works out *how* to get it.
- We use DuckDB, an embedded analytical database: it runs inside the Python process,
  needs no server, and is built for scanning and summarising large tables.

## What we will do
1. Load two CSV files straight from the web into tables.
2. Look at what the tables contain (SHOW TABLES, DESCRIBE).
3. Read rows with SELECT, filter them with WHERE and sort them with ORDER BY.
4. Summarise them with COUNT, MIN, MAX and AVG.
5. Combine the two tables with JOIN and summarise per group with GROUP BY.
6. Pull a query result into pandas and draw a scatterplot.

## Glossary
- **Relation / Table**: a named, two-dimensional structure of rows and columns.
- **Tuple**: one row of a relation.
- **Attribute**: one column of a relation, with a name and a type.
- **Join**: combining rows from two relations where an equality condition holds
  between their columns.
- **Aggregation**: computing a summary value (count, min, max, average) over a set
  of rows, optionally per group with GROUP BY.
- **Embedded analytical database engine**: an in-process database optimised for
  scanning and aggregating large columnar datasets rather than row-by-row updates.
"""
