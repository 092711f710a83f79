"""配置包"""

from .pipeline_settings import PipelineSettings, get_pipeline_settings, load_env_file

__all__ = ["PipelineSettings", "get_pipeline_settings", "load_env_file"]
