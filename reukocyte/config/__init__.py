"""Reading and merging RuboCop-style YAML configuration."""