"""
Descriptors for ``pg_catalog`` tables and views.

Shorthand ``(name, type)`` columns of a ``table`` are NOT NULL; nullable or
version-gated columns use ``column(...)``.
"""

from pgmeta.catalog.descriptors import column, table, view

PG_NAMESPACE = table(
    "pg_catalog.pg_namespace",
    ("oid", "oid"),
    ("nspname", "name"),
    ("nspowner", "oid"),
    column("nspacl", "aclitem[]", nullable=True),
    order_by=("nspname",),
    primary_key=("oid",),
    description="Schemas (namespaces).",
)

PG_CLASS = table(
    "pg_catalog.pg_class",
    ("oid", "oid"),
    ("relname", "name"),
    ("relnamespace", "oid"),
    ("reltype", "oid"),
    ("reloftype", "oid"),
    ("relowner", "oid"),
    ("relam", "oid"),
    ("relfilenode", "oid"),
    ("reltablespace", "oid"),
    ("relpages", "int4"),
    ("reltuples", "float4"),
    ("relallvisible", "int4"),
    column("relallfrozen", "int4", since=18, description="Number of pages marked all-frozen in the visibility map."),
    ("reltoastrelid", "oid"),
    ("relhasindex", "bool"),
    ("relisshared", "bool"),
    ("relpersistence", "char"),
    ("relkind", "char"),
    ("relnatts", "int2"),
    ("relchecks", "int2"),
    ("relhasrules", "bool"),
    ("relhastriggers", "bool"),
    ("relhassubclass", "bool"),
    ("relrowsecurity", "bool"),
    ("relforcerowsecurity", "bool"),
    ("relispopulated", "bool"),
    ("relreplident", "char"),
    ("relispartition", "bool"),
    ("relrewrite", "oid"),
    ("relfrozenxid", "xid"),
    ("relminmxid", "xid"),
    column("relacl", "aclitem[]", nullable=True),
    column("reloptions", "text[]", nullable=True),
    column("relpartbound", "pg_node_tree", nullable=True),
    order_by=("relnamespace", "relname"),
    primary_key=("oid",),
    description="Tables, indexes, sequences, views and other relations.",
)

PG_ATTRIBUTE = table(
    "pg_catalog.pg_attribute",
    ("attrelid", "oid"),
    ("attname", "name"),
    ("atttypid", "oid"),
    ("attlen", "int2"),
    ("attnum", "int2"),
    column("attcacheoff", "int4", until=17),
    ("atttypmod", "int4"),
    column("attndims", "int4", until=16),
    column("attndims", "int2", since=17),
    ("attbyval", "bool"),
    ("attalign", "char"),
    ("attstorage", "char"),
    ("attcompression", "char"),
    ("attnotnull", "bool"),
    ("atthasdef", "bool"),
    ("atthasmissing", "bool"),
    ("attidentity", "char"),
    ("attgenerated", "char"),
    ("attisdropped", "bool"),
    ("attislocal", "bool"),
    column("attinhcount", "int4", until=15),
    column("attinhcount", "int2", since=16),
    ("attcollation", "oid"),
    column("attstattarget", "int4", until=16, description="Statistics target; -1 selects the system default."),
    column("attstattarget", "int2", nullable=True, since=17, description="Statistics target; null selects the system default."),
    column("attacl", "aclitem[]", nullable=True),
    column("attoptions", "text[]", nullable=True),
    column("attfdwoptions", "text[]", nullable=True),
    column("attmissingval", "anyarray", nullable=True),
    order_by=("attrelid", "attnum"),
    primary_key=("attrelid", "attnum"),
    description="Table columns.",
)

PG_TYPE = table(
    "pg_catalog.pg_type",
    ("oid", "oid"),
    ("typname", "name"),
    ("typnamespace", "oid"),
    ("typowner", "oid"),
    ("typlen", "int2"),
    ("typbyval", "bool"),
    ("typtype", "char"),
    ("typcategory", "char"),
    ("typispreferred", "bool"),
    ("typisdefined", "bool"),
    ("typdelim", "char"),
    ("typrelid", "oid"),
    ("typsubscript", "regproc"),
    ("typelem", "oid"),
    ("typarray", "oid"),
    ("typinput", "regproc"),
    ("typoutput", "regproc"),
    ("typreceive", "regproc"),
    ("typsend", "regproc"),
    ("typmodin", "regproc"),
    ("typmodout", "regproc"),
    ("typanalyze", "regproc"),
    ("typalign", "char"),
    ("typstorage", "char"),
    ("typnotnull", "bool"),
    ("typbasetype", "oid"),
    ("typtypmod", "int4"),
    ("typndims", "int4"),
    ("typcollation", "oid"),
    column("typdefaultbin", "pg_node_tree", nullable=True),
    column("typdefault", "text", nullable=True),
    column("typacl", "aclitem[]", nullable=True),
    order_by=("typnamespace", "typname"),
    primary_key=("oid",),
    description="Data types.",
)

PG_PROC = table(
    "pg_catalog.pg_proc",
    ("oid", "oid"),
    ("proname", "name"),
    ("pronamespace", "oid"),
    ("proowner", "oid"),
    ("prolang", "oid"),
    ("procost", "float4"),
    ("prorows", "float4"),
    ("provariadic", "oid"),
    ("prosupport", "regproc"),
    ("prokind", "char"),
    ("prosecdef", "bool"),
    ("proleakproof", "bool"),
    ("proisstrict", "bool"),
    ("proretset", "bool"),
    ("provolatile", "char"),
    ("proparallel", "char"),
    ("pronargs", "int2"),
    ("pronargdefaults", "int2"),
    ("prorettype", "oid"),
    ("proargtypes", "oidvector"),
    column("proallargtypes", "oid[]", nullable=True),
    column("proargmodes", "char[]", nullable=True),
    column("proargnames", "text[]", nullable=True),
    column("proargdefaults", "pg_node_tree", nullable=True),
    column("protrftypes", "oid[]", nullable=True),
    ("prosrc", "text"),
    column("probin", "text", nullable=True),
    column("prosqlbody", "pg_node_tree", nullable=True),
    column("proconfig", "text[]", nullable=True),
    column("proacl", "aclitem[]", nullable=True),
    order_by=("pronamespace", "proname", "oid"),
    primary_key=("oid",),
    description="Functions, procedures, aggregates and window functions.",
)

PG_CONSTRAINT = table(
    "pg_catalog.pg_constraint",
    ("oid", "oid"),
    ("conname", "name"),
    ("connamespace", "oid"),
    ("contype", "char"),
    ("condeferrable", "bool"),
    ("condeferred", "bool"),
    column("conenforced", "bool", since=18),
    ("convalidated", "bool"),
    ("conrelid", "oid"),
    ("contypid", "oid"),
    ("conindid", "oid"),
    ("conparentid", "oid"),
    ("confrelid", "oid"),
    ("confupdtype", "char"),
    ("confdeltype", "char"),
    ("confmatchtype", "char"),
    ("conislocal", "bool"),
    column("coninhcount", "int4", until=15),
    column("coninhcount", "int2", since=16),
    ("connoinherit", "bool"),
    column("conperiod", "bool", since=18),
    column("conkey", "int2[]", nullable=True),
    column("confkey", "int2[]", nullable=True),
    column("conpfeqop", "oid[]", nullable=True),
    column("conppeqop", "oid[]", nullable=True),
    column("conffeqop", "oid[]", nullable=True),
    column("confdelsetcols", "int2[]", nullable=True, since=15),
    column("conexclop", "oid[]", nullable=True),
    column("conbin", "pg_node_tree", nullable=True),
    order_by=("connamespace", "conrelid", "conname"),
    primary_key=("oid",),
    description="Check, not-null, primary key, unique, foreign key and exclusion constraints.",
)

PG_INDEX = table(
    "pg_catalog.pg_index",
    ("indexrelid", "oid"),
    ("indrelid", "oid"),
    ("indnatts", "int2"),
    ("indnkeyatts", "int2"),
    ("indisunique", "bool"),
    column("indnullsnotdistinct", "bool", since=15),
    ("indisprimary", "bool"),
    ("indisexclusion", "bool"),
    ("indimmediate", "bool"),
    ("indisclustered", "bool"),
    ("indisvalid", "bool"),
    ("indcheckxmin", "bool"),
    ("indisready", "bool"),
    ("indislive", "bool"),
    ("indisreplident", "bool"),
    ("indkey", "int2vector"),
    ("indcollation", "oidvector"),
    ("indclass", "oidvector"),
    ("indoption", "int2vector"),
    column("indexprs", "pg_node_tree", nullable=True),
    column("indpred", "pg_node_tree", nullable=True),
    order_by=("indrelid", "indexrelid"),
    primary_key=("indexrelid",),
    description="Index metadata supplementing pg_class.",
)

PG_DESCRIPTION = table(
    "pg_catalog.pg_description",
    ("objoid", "oid"),
    ("classoid", "oid"),
    ("objsubid", "int4"),
    ("description", "text"),
    order_by=("objoid", "classoid", "objsubid"),
    primary_key=("objoid", "classoid", "objsubid"),
)

PG_ENUM = table(
    "pg_catalog.pg_enum",
    ("oid", "oid"),
    ("enumtypid", "oid"),
    ("enumsortorder", "float4"),
    ("enumlabel", "name"),
    order_by=("enumtypid", "enumsortorder"),
    primary_key=("oid",),
)

PG_EXTENSION = table(
    "pg_catalog.pg_extension",
    ("oid", "oid"),
    ("extname", "name"),
    ("extowner", "oid"),
    ("extnamespace", "oid"),
    ("extrelocatable", "bool"),
    ("extversion", "text"),
    column("extconfig", "oid[]", nullable=True),
    column("extcondition", "text[]", nullable=True),
    order_by=("extname",),
    primary_key=("oid",),
)

PG_INHERITS = table(
    "pg_catalog.pg_inherits",
    ("inhrelid", "oid"),
    ("inhparent", "oid"),
    ("inhseqno", "int4"),
    ("inhdetachpending", "bool"),
    order_by=("inhrelid", "inhseqno"),
    primary_key=("inhrelid", "inhseqno"),
)

PG_DEPEND = table(
    "pg_catalog.pg_depend",
    ("classid", "oid"),
    ("objid", "oid"),
    ("objsubid", "int4"),
    ("refclassid", "oid"),
    ("refobjid", "oid"),
    ("refobjsubid", "int4"),
    ("deptype", "char"),
    order_by=("classid", "objid", "objsubid", "refclassid", "refobjid", "refobjsubid"),
)

PG_AM = table(
    "pg_catalog.pg_am",
    ("oid", "oid"),
    ("amname", "name"),
    ("amhandler", "regproc"),
    ("amtype", "char"),
    order_by=("amname",),
    primary_key=("oid",),
)

PG_LANGUAGE = table(
    "pg_catalog.pg_language",
    ("oid", "oid"),
    ("lanname", "name"),
    ("lanowner", "oid"),
    ("lanispl", "bool"),
    ("lanpltrusted", "bool"),
    ("lanplcallfoid", "oid"),
    ("laninline", "oid"),
    ("lanvalidator", "oid"),
    column("lanacl", "aclitem[]", nullable=True),
    order_by=("lanname",),
    primary_key=("oid",),
)

PG_RANGE = table(
    "pg_catalog.pg_range",
    ("rngtypid", "oid"),
    ("rngsubtype", "oid"),
    ("rngmultitypid", "oid"),
    ("rngcollation", "oid"),
    ("rngsubopc", "oid"),
    ("rngcanonical", "regproc"),
    ("rngsubdiff", "regproc"),
    order_by=("rngtypid",),
    primary_key=("rngtypid",),
)

PG_POLICY = table(
    "pg_catalog.pg_policy",
    ("oid", "oid"),
    ("polname", "name"),
    ("polrelid", "oid"),
    ("polcmd", "char"),
    ("polpermissive", "bool"),
    ("polroles", "oid[]"),
    column("polqual", "pg_node_tree", nullable=True),
    column("polwithcheck", "pg_node_tree", nullable=True),
    order_by=("polrelid", "polname"),
    primary_key=("oid",),
    description="Row-level security policies.",
)

PG_TRIGGER = table(
    "pg_catalog.pg_trigger",
    ("oid", "oid"),
    ("tgrelid", "oid"),
    ("tgparentid", "oid"),
    ("tgname", "name"),
    ("tgfoid", "oid"),
    ("tgtype", "int2"),
    ("tgenabled", "char"),
    ("tgisinternal", "bool"),
    ("tgconstrrelid", "oid"),
    ("tgconstrindid", "oid"),
    ("tgconstraint", "oid"),
    ("tgdeferrable", "bool"),
    ("tginitdeferred", "bool"),
    ("tgnargs", "int2"),
    ("tgattr", "int2vector"),
    ("tgargs", "bytea"),
    column("tgqual", "pg_node_tree", nullable=True),
    column("tgoldtable", "name", nullable=True),
    column("tgnewtable", "name", nullable=True),
    order_by=("tgrelid", "tgname"),
    primary_key=("oid",),
)

PG_DATABASE = table(
    "pg_catalog.pg_database",
    ("oid", "oid"),
    ("datname", "name"),
    ("datdba", "oid"),
    ("encoding", "int4"),
    column("datlocprovider", "char", since=15, description="Locale provider: c (libc), i (icu) or b (builtin)."),
    ("datistemplate", "bool"),
    ("datallowconn", "bool"),
    column("dathasloginevt", "bool", since=17),
    ("datconnlimit", "int4"),
    column("datlastsysoid", "oid", until=14),
    ("datfrozenxid", "xid"),
    ("datminmxid", "xid"),
    ("dattablespace", "oid"),
    column("datcollate", "name", until=14),
    column("datcollate", "text", since=15),
    column("datctype", "name", until=14),
    column("datctype", "text", since=15),
    column("daticulocale", "text", nullable=True, since=15, until=16, description="Renamed to datlocale in 17."),
    column("datlocale", "text", nullable=True, since=17),
    column("daticurules", "text", nullable=True, since=16),
    column("datcollversion", "text", nullable=True, since=15),
    column("datacl", "aclitem[]", nullable=True),
    order_by=("datname",),
    primary_key=("oid",),
    description="Databases of the cluster.",
)

PG_COLLATION = table(
    "pg_catalog.pg_collation",
    ("oid", "oid"),
    ("collname", "name"),
    ("collnamespace", "oid"),
    ("collowner", "oid"),
    ("collprovider", "char"),
    ("collisdeterministic", "bool"),
    ("collencoding", "int4"),
    column("collcollate", "name", until=14),
    column("collcollate", "text", nullable=True, since=15),
    column("collctype", "name", until=14),
    column("collctype", "text", nullable=True, since=15),
    column("colliculocale", "text", nullable=True, since=15, until=16, description="Renamed to colllocale in 17."),
    column("colllocale", "text", nullable=True, since=17),
    column("collicurules", "text", nullable=True, since=16),
    column("collversion", "text", nullable=True),
    order_by=("collnamespace", "collname"),
    primary_key=("oid",),
)

# Membership rows gained their own OID and the inherit/set options in 16;
# the two shapes are declared as separate variants.
PG_AUTH_MEMBERS_14 = table(
    "pg_catalog.pg_auth_members",
    ("roleid", "oid"),
    ("member", "oid"),
    ("grantor", "oid"),
    ("admin_option", "bool"),
    until=15,
    order_by=("roleid", "member"),
    primary_key=("roleid", "member"),
)

PG_AUTH_MEMBERS_16 = table(
    "pg_catalog.pg_auth_members",
    ("oid", "oid"),
    ("roleid", "oid"),
    ("member", "oid"),
    ("grantor", "oid"),
    ("admin_option", "bool"),
    ("inherit_option", "bool"),
    ("set_option", "bool"),
    since=16,
    order_by=("roleid", "member", "grantor"),
    primary_key=("oid",),
)

PG_STATISTIC_EXT_DATA_14 = table(
    "pg_catalog.pg_statistic_ext_data",
    ("stxoid", "oid"),
    column("stxdndistinct", "pg_ndistinct", nullable=True),
    column("stxddependencies", "pg_dependencies", nullable=True),
    column("stxdmcv", "pg_mcv_list", nullable=True),
    column("stxdexpr", "_pg_statistic", nullable=True),
    until=14,
    order_by=("stxoid",),
    primary_key=("stxoid",),
)

PG_STATISTIC_EXT_DATA_15 = table(
    "pg_catalog.pg_statistic_ext_data",
    ("stxoid", "oid"),
    ("stxdinherit", "bool"),
    column("stxdndistinct", "pg_ndistinct", nullable=True),
    column("stxddependencies", "pg_dependencies", nullable=True),
    column("stxdmcv", "pg_mcv_list", nullable=True),
    column("stxdexpr", "_pg_statistic", nullable=True),
    since=15,
    order_by=("stxoid", "stxdinherit"),
    primary_key=("stxoid", "stxdinherit"),
)

PG_SUBSCRIPTION = table(
    "pg_catalog.pg_subscription",
    ("oid", "oid"),
    ("subdbid", "oid"),
    column("subskiplsn", "pg_lsn", since=15),
    ("subname", "name"),
    ("subowner", "oid"),
    ("subenabled", "bool"),
    ("subbinary", "bool"),
    column("substream", "bool", until=15),
    column("substream", "char", since=16, description="f (off), t (on) or p (parallel)."),
    column("subtwophasestate", "char", since=15),
    column("subdisableonerr", "bool", since=15),
    column("subpasswordrequired", "bool", since=16),
    column("subrunasowner", "bool", since=16),
    column("subfailover", "bool", since=17),
    ("subconninfo", "text"),
    column("subslotname", "name", nullable=True),
    ("subsynccommit", "text"),
    ("subpublications", "text[]"),
    column("suborigin", "text", nullable=True, since=16),
    order_by=("subname",),
    primary_key=("oid",),
    description="Logical replication subscriptions. Reading subconninfo requires superuser.",
)

PG_ROLES = view(
    "pg_catalog.pg_roles",
    ("rolname", "name"),
    ("rolsuper", "bool"),
    ("rolinherit", "bool"),
    ("rolcreaterole", "bool"),
    ("rolcreatedb", "bool"),
    ("rolcanlogin", "bool"),
    ("rolreplication", "bool"),
    ("rolconnlimit", "int4"),
    ("rolpassword", "text"),
    ("rolvaliduntil", "timestamptz"),
    ("rolbypassrls", "bool"),
    ("rolconfig", "text[]"),
    ("oid", "oid"),
    order_by=("rolname",),
    primary_key=("oid",),
)

PG_TABLES = view(
    "pg_catalog.pg_tables",
    ("schemaname", "name"),
    ("tablename", "name"),
    ("tableowner", "name"),
    ("tablespace", "name"),
    ("hasindexes", "bool"),
    ("hasrules", "bool"),
    ("hastriggers", "bool"),
    ("rowsecurity", "bool"),
    order_by=("schemaname", "tablename"),
    primary_key=("schemaname", "tablename"),
)

PG_VIEWS = view(
    "pg_catalog.pg_views",
    ("schemaname", "name"),
    ("viewname", "name"),
    ("viewowner", "name"),
    ("definition", "text"),
    order_by=("schemaname", "viewname"),
    primary_key=("schemaname", "viewname"),
)

PG_STATS = view(
    "pg_catalog.pg_stats",
    ("schemaname", "name"),
    ("tablename", "name"),
    ("attname", "name"),
    ("inherited", "bool"),
    ("null_frac", "float4"),
    ("avg_width", "int4"),
    ("n_distinct", "float4"),
    ("most_common_vals", "anyarray"),
    ("most_common_freqs", "float4[]"),
    ("histogram_bounds", "anyarray"),
    ("correlation", "float4"),
    ("most_common_elems", "anyarray"),
    ("most_common_elem_freqs", "float4[]"),
    ("elem_count_histogram", "float4[]"),
    column("range_length_histogram", "anyarray", since=17),
    column("range_empty_frac", "float4", since=17),
    column("range_bounds_histogram", "anyarray", since=17),
    order_by=("schemaname", "tablename", "attname"),
    primary_key=("schemaname", "tablename", "attname", "inherited"),
    description="Planner statistics per column, readable form of pg_statistic.",
)

PG_BACKEND_MEMORY_CONTEXTS = view(
    "pg_catalog.pg_backend_memory_contexts",
    ("name", "text"),
    ("ident", "text"),
    column("type", "text", since=18),
    column("parent", "text", until=17, description="Replaced by path in 18."),
    ("level", "int4"),
    column("path", "int4[]", since=18),
    ("total_bytes", "int8"),
    ("total_nblocks", "int8"),
    ("free_bytes", "int8"),
    ("free_chunks", "int8"),
    ("used_bytes", "int8"),
    primary_key=("name", "ident"),
)

PG_STAT_BGWRITER = view(
    "pg_catalog.pg_stat_bgwriter",
    column("checkpoints_timed", "int8", until=16),
    column("checkpoints_req", "int8", until=16),
    column("checkpoint_write_time", "float8", until=16),
    column("checkpoint_sync_time", "float8", until=16),
    column("buffers_checkpoint", "int8", until=16),
    ("buffers_clean", "int8"),
    ("maxwritten_clean", "int8"),
    column("buffers_backend", "int8", until=16),
    column("buffers_backend_fsync", "int8", until=16),
    ("buffers_alloc", "int8"),
    ("stats_reset", "timestamptz"),
    description="Background writer statistics; checkpoint counters moved to pg_stat_checkpointer in 17.",
)

PG_STAT_CHECKPOINTER = view(
    "pg_catalog.pg_stat_checkpointer",
    ("num_timed", "int8"),
    ("num_requested", "int8"),
    column("num_done", "int8", since=18),
    ("restartpoints_timed", "int8"),
    ("restartpoints_req", "int8"),
    ("restartpoints_done", "int8"),
    ("write_time", "float8"),
    ("sync_time", "float8"),
    ("buffers_written", "int8"),
    column("slru_written", "int8", since=18),
    ("stats_reset", "timestamptz"),
    since=17,
)

PG_STAT_GSSAPI = view(
    "pg_catalog.pg_stat_gssapi",
    ("pid", "int4"),
    ("gss_authenticated", "bool"),
    ("principal", "text"),
    ("encrypted", "bool"),
    column("credentials_delegated", "bool", since=16),
    order_by=("pid",),
    primary_key=("pid",),
)

PG_STAT_IO = view(
    "pg_catalog.pg_stat_io",
    ("backend_type", "text"),
    ("object", "text"),
    ("context", "text"),
    ("reads", "int8"),
    column("read_bytes", "numeric", since=18),
    ("read_time", "float8"),
    ("writes", "int8"),
    column("write_bytes", "numeric", since=18),
    ("write_time", "float8"),
    ("writebacks", "int8"),
    ("writeback_time", "float8"),
    ("extends", "int8"),
    column("extend_bytes", "numeric", since=18),
    ("extend_time", "float8"),
    column("op_bytes", "int8", until=17, description="Replaced by per-operation byte counters in 18."),
    ("hits", "int8"),
    ("evictions", "int8"),
    ("reuses", "int8"),
    ("fsyncs", "int8"),
    ("fsync_time", "float8"),
    ("stats_reset", "timestamptz"),
    since=16,
    order_by=("backend_type", "object", "context"),
    primary_key=("backend_type", "object", "context"),
)

PG_AIOS = view(
    "pg_catalog.pg_aios",
    ("pid", "int4"),
    ("io_id", "int4"),
    ("io_generation", "int8"),
    ("state", "text"),
    ("operation", "text"),
    ("off", "int8"),
    ("length", "int8"),
    ("target", "text"),
    ("handle_data_len", "int2"),
    ("raw_result", "int4"),
    ("result", "text"),
    ("target_desc", "text"),
    ("f_sync", "bool"),
    ("f_localmem", "bool"),
    ("f_buffered", "bool"),
    since=18,
    order_by=("pid", "io_id"),
    primary_key=("pid", "io_id", "io_generation"),
    description="Asynchronous I/O handles currently in use.",
)

PG_STAT_PROGRESS_VACUUM = view(
    "pg_catalog.pg_stat_progress_vacuum",
    ("pid", "int4"),
    ("datid", "oid"),
    ("datname", "name"),
    ("relid", "oid"),
    ("phase", "text"),
    ("heap_blks_total", "int8"),
    ("heap_blks_scanned", "int8"),
    ("heap_blks_vacuumed", "int8"),
    ("index_vacuum_count", "int8"),
    column("max_dead_tuples", "int8", until=16),
    column("num_dead_tuples", "int8", until=16),
    column("max_dead_tuple_bytes", "int8", since=17),
    column("dead_tuple_bytes", "int8", since=17),
    column("num_dead_item_ids", "int8", since=17),
    column("indexes_total", "int8", since=17),
    column("indexes_processed", "int8", since=17),
    column("delay_time", "float8", since=18),
    order_by=("pid",),
    primary_key=("pid",),
)

PG_STAT_SUBSCRIPTION_STATS = view(
    "pg_catalog.pg_stat_subscription_stats",
    ("subid", "oid"),
    ("subname", "name"),
    ("apply_error_count", "int8"),
    ("sync_error_count", "int8"),
    column("confl_insert_exists", "int8", since=18),
    column("confl_update_origin_differs", "int8", since=18),
    column("confl_update_exists", "int8", since=18),
    column("confl_update_missing", "int8", since=18),
    column("confl_delete_origin_differs", "int8", since=18),
    column("confl_delete_missing", "int8", since=18),
    column("confl_multiple_unique_conflicts", "int8", since=18),
    ("stats_reset", "timestamptz"),
    since=15,
    order_by=("subid",),
    primary_key=("subid",),
)

PG_SHMEM_ALLOCATIONS_NUMA = view(
    "pg_catalog.pg_shmem_allocations_numa",
    ("name", "text"),
    ("numa_node", "int4"),
    ("size", "int8"),
    since=18,
    order_by=("name", "numa_node"),
    primary_key=("name", "numa_node"),
)

ENTITIES = (
    PG_NAMESPACE,
    PG_CLASS,
    PG_ATTRIBUTE,
    PG_TYPE,
    PG_PROC,
    PG_CONSTRAINT,
    PG_INDEX,
    PG_DESCRIPTION,
    PG_ENUM,
    PG_EXTENSION,
    PG_INHERITS,
    PG_DEPEND,
    PG_AM,
    PG_LANGUAGE,
    PG_RANGE,
    PG_POLICY,
    PG_TRIGGER,
    PG_DATABASE,
    PG_COLLATION,
    PG_AUTH_MEMBERS_14,
    PG_AUTH_MEMBERS_16,
    PG_STATISTIC_EXT_DATA_14,
    PG_STATISTIC_EXT_DATA_15,
    PG_SUBSCRIPTION,
    PG_ROLES,
    PG_TABLES,
    PG_VIEWS,
    PG_STATS,
    PG_BACKEND_MEMORY_CONTEXTS,
    PG_STAT_BGWRITER,
    PG_STAT_CHECKPOINTER,
    PG_STAT_GSSAPI,
    PG_STAT_IO,
    PG_AIOS,
    PG_STAT_PROGRESS_VACUUM,
    PG_STAT_SUBSCRIPTION_STATS,
    PG_SHMEM_ALLOCATIONS_NUMA,
)
