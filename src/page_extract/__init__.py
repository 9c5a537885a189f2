"""Structure inference and validation for scraped page content.

Subpackages / modules:
  config      -- tunables and project paths (env-overridable)
  parsing     -- turn an arbitrary extraction payload into a table or text
  validation  -- score extracted rows against the user's expectations
  export      -- CSV / JSON / markdown renderers for parsed tables
  report      -- one-call parse + validate + summarise used by the extract tool
"""
